import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "vvc_structure", "version.py")
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="vvc_structure",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
    author="The VVdeC Authors",
    description="Human readable dumps of VVC decoder picture partitioning.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="BSD-3-Clause-Clear",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Telecommunications Industry",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    keywords="vvc h266 decoder debug",
    python_requires=">=3.6",
    install_requires=[
        "sentinels",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
