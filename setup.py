from setuptools import find_packages, setup

setup(
    name="prettysize",
    version="0.1.0",
    description="Strongly-typed byte sizes with human-readable formatting",
    packages=find_packages(include=["prettysize", "prettysize.*"]),
    python_requires=">=3.11",
    install_requires=[
        "result",
        "rich",
        "typer",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["prettysize=prettysize.cli.app:cli"]},
)
