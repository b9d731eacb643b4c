
import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

packages = setuptools.find_packages(exclude=["tests", "tests.*"])

setuptools.setup(
    name="protoclass",
    version="0.1.0",
    author="Nick Setzer",
    author_email="nicksetzer@github.com",
    description="convert javascript constructor functions into classes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=packages,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
