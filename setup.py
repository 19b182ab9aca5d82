from setuptools import setup, find_packages
import re

# Read version from __init__.py
with open("doctoken/__init__.py", encoding="utf-8") as f:
    content = f.read()
    version_match = re.search(r"__version__\s*=\s*['\"]([^'\"]+)['\"]", content)
    if not version_match:
        raise RuntimeError("Unable to find version string in doctoken/__init__.py")
    version = version_match.group(1)

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="doctoken",
    version=version,
    description="Tokenizes documentation comments and renders type expressions as linked token streams.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["doctoken", "doctoken.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
