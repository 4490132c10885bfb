from setuptools import find_packages, setup

setup(
    name="reflink",
    version="0.1.0",
    description="Reference linking for issues, merge requests and snippets in rendered documents",
    packages=find_packages(include=["reflink", "reflink.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Config and output schemas
        "typer<0.26",  # CLI; 0.26+ no longer exposes the click context to group callbacks
        "click",  # CLI context handling
        "rich",  # Terminal formatting
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
        "pymongo",  # MongoDB
        "mongomock",  # In-memory MongoDB for tests
        "jinja2",  # Link markup rendering
        "markdown",  # Markdown tree processing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
    },
    entry_points={
        "console_scripts": [
            "reflink=reflink.cli:main",
        ],
    },
)
