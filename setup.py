from setuptools import setup, find_packages

setup(
    name='genome-sizes',
    version='0.1.0',
    description='Largest complete RefSeq genome size per species from the NCBI assembly summary.',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'pandas>=1.5',
        'pydantic>=2',
        'pyyaml',
        'requests',
        'click',
        'platformdirs',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        "console_scripts": [
            # 'genome-sizes' command will call the cli() group in cli/main.py
            "genome-sizes = cli.main:cli",
        ],
    },
    classifiers=[
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.10',
)
