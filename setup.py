from setuptools import setup, find_packages

setup(
    name="hms-mirror-strategy-wizard",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.5.0",
        "click>=8.1.7",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "strategy-wizard=strategy_wizard.cli:main",
        ],
    },
    python_requires=">=3.9",
)
