import re

import setuptools


with open("gitlab_client/__init__.py", "r") as fh:
    version = re.search(r'^__version__ = "(.+)"$', fh.read(), re.MULTILINE).group(1)

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="gitlab_client",
    version=version,
    license="MIT",
    keywords="API GitLab push rules",
    description="A developer friendly GitLab API client",
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    extras_require={
        "dev": ["black", "twine", "wheel"],
        "test": ["pytest", "coverage", "pytest-cov", "requests-mock"],
    },
    tests_require=["pytest", "pytest-cov", "requests-mock"],
    install_requires=[
        "requests",
        "pydantic>=2.0",
        "inflection",
    ],
)
