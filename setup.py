"""The script for building the brokerconsole package."""

from pathlib import Path

from setuptools import find_packages, setup

DESCRIPTION = (
    'The framework for rendering the forms of the broker management '
    'console outside of a browser.'
)

with Path('requirements.txt').open(encoding='utf-8') as outfile:
    requirements = outfile.read().splitlines()

setup(
    name='brokerconsole',
    version='0.1.0',
    description=DESCRIPTION,
    long_description=DESCRIPTION,
    license='Apache License, Version 2.0',
    packages=find_packages(exclude=('demos.*', 'demos', 'tests.*', 'tests')),
    package_data={'brokerconsole': ['resources/*/*/*.html']},
    include_package_data=True,
    data_files=[('', ['requirements.txt'])],
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.10',
    keywords='python broker management console forms',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Systems Administration',
    ],
)
