from setuptools import find_packages, setup

setup(
    name="halgen",
    version="0.1.0",
    description="HAL resource generation from metadata-mapped domain objects",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Metadata descriptors and configuration
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
)
