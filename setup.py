from setuptools import find_packages, setup

setup(
    name="plainperm",
    version="0.1.0",
    description=(
        "Permutations in lexicographic and plain changes order, "
        "with lexicographic ranking"
    ),
    packages=find_packages(),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
)
