"""Package setup for dl_esm."""

from setuptools import setup, find_packages

setup(
    name="dl-esm",
    version="1.0.0",
    description="Download ESM modules from npm via jsDelivr for offline use",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dl-esm=dl_esm.cli:main",
        ],
    },
)
