from setuptools import find_packages, setup

setup(
    name="abhyas",
    version="0.1.0",
    description="Abhyas - track a personal worklist of practice links",
    packages=find_packages(include=["abhyas", "abhyas.*"]),
    python_requires=">=3.11",
    install_requires=[
        "typer<0.26",  # Command-line interface; 0.26+ bundles its own click
        "click",  # Usage errors raised through typer
        "rich",  # Terminal formatting and prompts
        "pydantic>=2",  # Config and output schemas
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "abhyas=abhyas.cli:main",
        ],
    },
)
