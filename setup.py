import os

from setuptools import find_packages, setup


def read_version() -> str:
    with open(os.path.join(os.path.dirname(__file__), "tagindex", "version.txt")) as f:
        return f.read().strip()


setup(
    name="tagindex",
    version=read_version(),
    description="Bidirectional tag index with set algebra queries over tagged values",
    packages=find_packages(exclude=("tests", "tests.*", "examples", "benchmarks")),
    python_requires=">=3.8",
    install_requires=["psutil"],
    entry_points={"console_scripts": ["tagindex_benchmark=tagindex.entry_points.benchmark:main"]},
    zip_safe=False,
    package_data={"tagindex": ["version.txt"]},
)
