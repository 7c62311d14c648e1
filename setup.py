from setuptools import setup, find_packages

setup(
    name="taptimer",
    version="0.1.0",
    description="Tap timers embedded in markdown notes, with reports & session logs",
    packages=find_packages(include=["taptimer", "taptimer.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
        "readchar",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "taptimer=taptimer.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
