"""
Setup script for starchain package
"""

from setuptools import setup, find_packages

setup(
    name="starchain",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "eth-account>=0.10.0",
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "starchain-node=starchain.node:main",
        ],
    },
    python_requires=">=3.8",
    author="StarChain",
    description="In-memory star ownership registry on a hash-linked ledger",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
