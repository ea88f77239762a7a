from setuptools import setup, find_packages

setup(
    name="expense_report",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "expense-report=expense_report.cli:main",
        ],
    },
    author="Price Hatfield",
    description="A tool for building a monthly expense report from bank statement CSV files",
    python_requires=">=3.8",
)
