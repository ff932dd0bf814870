from setuptools import setup, find_packages

setup(
    name="airportsim",
    version="0.1.0",
    description="Two-runway airport scheduling on a discrete clock with heap-ordered queues",
    author="adamfilli",
    packages=find_packages(include=["airportsim", "airportsim.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "airportsim=airportsim.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
