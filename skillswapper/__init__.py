"""
SkillSwapper: reciprocal skill-exchange matching service.
"""

__version__ = "0.1.0"
