"""
LearnPersona

Persona-based learning recommendations: a ten-question quiz classifies each
learner into one of five learning personas, and courses and strategies are
recommended for that persona. L&D professionals get organization dashboards.
"""

__version__ = "1.0.0"
