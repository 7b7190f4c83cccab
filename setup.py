# setup.py
from setuptools import setup, find_packages

setup(
    name="wld_analyzer",
    version="0.1.0",
    packages=find_packages(include=['wld_analyzer', 'wld_analyzer.*']),
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    python_requires=">=3.8",
    description="Decoder and map renderer for Terraria world save files",
    keywords="terraria, wld, world, map",
    entry_points={
        'console_scripts': [
            'render-wld=wld_analyzer.main:main',
        ],
    }
)
