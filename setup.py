# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="bytetree",
    version="1.0.0",
    description="Render files and directories as size-annotated text trees",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["bytetree*"]),
    package_data={"bytetree.interface.locales": ["*.json"]},
    python_requires=">=3.9",
    install_requires=[
        "customtkinter",  # Desktop viewer (launched when no arguments are given)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'bytetree=bytetree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
