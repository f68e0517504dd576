"""
NFTScope Setup Configuration
Decodes smart-contract tokenURI / render output into renderable media
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="nftscope",
    version="1.0.0",
    description="Decode tokenURI / render contract output into renderable media items",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    python_requires=">=3.8",
    install_requires=[
        # Core functionality uses only stdlib
        # Optional dependencies for API/GUI interfaces
    ],
    extras_require={
        "api": ["fastapi>=0.104.0", "uvicorn>=0.24.0"],
        "gui": ["flask>=3.0.0"],
        "all": ["fastapi>=0.104.0", "uvicorn>=0.24.0", "flask>=3.0.0"],
        "dev": [
            "pytest>=8.0.0",
            "httpx>=0.25.0",
            "fastapi>=0.104.0",
            "flask>=3.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nftscope=nftscope.cli:main",
        ],
    },
)
