# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="imageassetgen",
    version="1.0.0",
    description="Generate Swift image asset enums and wrappers from Xcode asset catalogs",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["imageassetgen*"]),
    package_data={
        "imageassetgen.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'imageassetgen=imageassetgen.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
