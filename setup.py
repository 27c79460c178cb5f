"""
Setup script for lifecycle-hooks
"""

from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent
README = (HERE / "README.md").read_text(encoding="utf-8")

setup(
    name="lifecycle-hooks",
    version="1.0.0",
    description="Container lifecycle hook runner for node agents",
    long_description=README,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "aiodocker>=0.21.0",
        "httpx>=0.27.0",
        "pydantic>=2.11.5",
        "pydantic-settings>=2.12.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="containers lifecycle hooks kubelet",
)
