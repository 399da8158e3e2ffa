from setuptools import setup, find_packages

setup(
    name="fluent-ansi",
    version="0.1.0",
    description="Composable ANSI terminal styles rendered to minimal escape sequences",
    packages=find_packages(include=["fluent_ansi", "fluent_ansi.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["fluent-ansi=fluent_ansi.cli:main"],
    },
    python_requires=">=3.11",
)
