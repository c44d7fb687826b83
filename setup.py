"""
Setup script for N-of-1 Analysis package
"""

from setuptools import setup, find_packages

# Read README for long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Read requirements
with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="nof1-analysis",
    version="1.0.0",
    author="N-of-1 Team",
    author_email="",
    description="Outlier-robust, distribution-free statistics for personal (N-of-1) experiments",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["nof1_analysis", "nof1_analysis.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "viz": [
            "matplotlib>=3.3.0",
        ],
        "dev": [
            "pytest>=6.2.0",
            "pytest-cov>=2.12.0",
            "black>=21.0",
            "flake8>=3.9.0",
            "matplotlib>=3.3.0",
        ],
        "all": [
            "matplotlib>=3.3.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords=[
        "n-of-1",
        "self-experimentation",
        "mann-whitney",
        "effect-size",
        "outlier-detection",
        "intervention-analysis",
    ],
)
