from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="oscmd",
    packages=find_packages(exclude=["tests"]),
    version="0.1.0",
    install_requires=[
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
            "pyperclip",
        ]
    },
    entry_points={
        "console_scripts": [
            "oscmd=oscmd.cli:main"
        ]
    },
    description="Build and run OS commands, pipelines and clipboard copies",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    long_description=long_description,
    long_description_content_type="text/markdown",
)
