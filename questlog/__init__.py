"""Questlog - activity scoring and quest completion for cohort programs"""

__version__ = "0.1.0"
