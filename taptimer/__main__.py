# taptimer/__main__.py
# Allow `python -m taptimer`

from .cli.app import app

if __name__ == "__main__":
    app()
