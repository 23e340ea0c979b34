from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fwgraph",
    version="0.1.0",
    description="All-pairs shortest paths (Floyd-Warshall) on undirected weighted graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "dev", "examples")),
    python_requires=">=3.9",
    install_requires=["networkx", "pyyaml", "jsonschema"],
    package_data={"fwgraph": ["schemas/*.json"]},
    extras_require={"test": ["pytest"]},
    tests_require=["pytest", "networkx"],
    entry_points={"console_scripts": ["fwgraph = fwgraph.cli:main"]},
)
