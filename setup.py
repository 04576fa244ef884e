from setuptools import setup, find_packages

setup(
    name="julian",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
        "numpy>=1.20.0",
        "pytz>=2021.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "tzdata",
        ],
    },
    entry_points={
        "console_scripts": [
            "julian=julian.cli:cli",
        ],
    },
    python_requires=">=3.9",
)
