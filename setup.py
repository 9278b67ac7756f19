from setuptools import setup, find_packages


with open("README.md") as f:
    readme = f.read()

setup(
    name="wireshapes",
    version="0.1.0",
    description="Wireframe line geometry for parametric shapes",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("examples", "tests")),
    python_requires=">=3.8",
    install_requires=["numpy", "matplotlib"],
    extras_require={"test": ["pytest"]},
)
