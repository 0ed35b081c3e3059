from setuptools import setup, find_packages

setup(
    name='monkey-interpreter',
    version='0.1.0',
    description='Tree-walking interpreter for the Monkey language',
    author='Ziver-opensource',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'monkey = monkey.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
