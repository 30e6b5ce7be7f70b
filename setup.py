from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="powerset",
    version="0.1.0",
    description="Power-set generation for a three-element integer set.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests",)),
    python_requires=">=3.9",
    install_requires=["PyYAML"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["powerset=powerset.cli:main"]},
)
