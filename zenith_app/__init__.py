"""
Zenith Wellbeing - Personal Wellness Tracking

A wellness tracking application for logging mood, meals, water intake, sleep,
weight and exercise routines. Drives guided breathing, fitness and stretch
routines through a shared sequence timer and requests AI-generated
suggestions from an external language model.
"""

__version__ = "0.1.0"
__author__ = "Zenith Team"
