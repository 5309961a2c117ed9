"""Core module for CurveFit - domain models, numerical routines and fitting logic."""
