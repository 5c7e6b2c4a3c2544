from setuptools import setup, find_packages

setup(
    name="reunion_core",
    version="0.1.0",
    description="Directory filtering, gallery categories and section loading for Class Reunion",
    packages=find_packages(),
    install_requires=[],
    python_requires=">=3.10",
)
