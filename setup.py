"""Package metadata and build configuration for horizon-sdk."""

from setuptools import find_packages, setup

setup(
    name="horizon-sdk",
    version="0.1.0",
    description="Async Python client for paginated and streamed Horizon resources",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.5",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
        ],
    },
)
