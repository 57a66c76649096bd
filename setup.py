"""
Setup script for the Infrastructure Pricing Engine package.
"""
from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Read requirements
requirements = (this_directory / "requirements.txt").read_text().strip().split('\n')

setup(
    name="infra-pricing-engine",
    version="1.0.0",
    author="Infrastructure Pricing Team",
    author_email="pricing@example.com",
    description="Cloud, Kubernetes licensing and low-code platform pricing engine",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["infra_pricing", "infra_pricing.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Systems Administration",
        "Topic :: Office/Business :: Financial",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    entry_points={
        "console_scripts": [
            "infra-pricing=infra_pricing.console:main_sync",
        ],
    },
    include_package_data=True,
    package_data={
        "infra_pricing": ["data/*.yaml"],
    },
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "flake8>=4.0.0",
            "mypy>=0.991",
        ],
    },
    keywords="cloud pricing kubernetes openshift licensing mendix outsystems finops",
)
