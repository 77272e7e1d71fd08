# setup.py

from setuptools import setup, find_packages

setup(
    name="geoviz",
    version="0.1.0",
    description="Stepwise computational geometry algorithms with a pygame visualizer",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygame>=2.1",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["geoviz-demo=geoviz.visualization.demo:main"],
    },
)
