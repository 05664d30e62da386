from setuptools import setup, find_packages

with open("README.md", 'r') as readme:
    long_description = readme.read()

setup(
    name="pycontainers",
    version="1.0",
    description="Priority heap and circular-buffer queue containers for python projects",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[
        "numpy"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    }
)
