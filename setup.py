from setuptools import setup, find_packages

setup(
    name="xaml-autouid",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "lxml>=4.6",
        "pyyaml>=5.4",
        "jsonschema>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    package_data={
        "xaml_autouid": ["schemas/*.json", "data/*.yaml"],
    },
    entry_points={
        "console_scripts": [
            "xaml-autouid=xaml_autouid.cli:main",
        ],
    },
)
