# taptimer/cli/__init__.py
# Typer application package; commands register themselves on import of app.py
