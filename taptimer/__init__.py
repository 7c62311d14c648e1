# taptimer/__init__.py
# Elapsed-time counters embedded in markdown notes

__version__ = "0.1.0"
