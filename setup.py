"""
Setup script for vocab-drill.

vocab-drill is the practice-session engine of the language-learning
platform. It turns a set of vocabulary words (or authored study-set
quizzes) into an ordered, adaptively reordered sequence of drills:

1. Question Generator - words -> shuffled multiple-choice, true/false,
   listening and pronunciation drills
2. Session Engine - retry-until-correct queue with per-type attempt limits
3. Practice flows - topic learning, spaced review, study-set quiz

The 'vocab-drill' command runs sessions from JSON word lists.
"""

from setuptools import find_packages, setup

setup(
    name="vocab-drill",
    version="1.0.0",
    description="Practice-session scheduler for vocabulary drills and quizzes",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vocab-drill=src.cli.drill:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning vocabulary flashcards quiz cli education",
)
