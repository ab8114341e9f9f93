from setuptools import setup, find_packages

setup(
    name="stackwork",
    version="0.1.0",
    description="Bounded undoable stack with infix-to-postfix conversion and bracket balance checking",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "stackwork=stackwork.main:main",
        ],
    },
)
