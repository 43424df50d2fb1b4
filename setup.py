"""Setup configuration for the fractal-jigsaw package."""

from setuptools import find_packages, setup

setup(
    name="fractal-jigsaw",
    version="0.1.0",
    packages=find_packages(include=["fractal_jigsaw", "fractal_jigsaw.*", "app", "app.*"]),
    python_requires=">=3.9",
    install_requires=[
        "fastapi",
        "uvicorn",
        "pydantic>=2",
        "pydantic-settings",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "httpx",
        ],
        "dev": [
            "pytest",
            "pytest-cov",
            "httpx",
            "black",
            "flake8",
            "mypy",
            "isort",
        ],
    },
)
