#!/usr/bin/env python3

from setuptools import setup, find_packages


def read_file(fn):
    with open(fn) as f:
        content = f.read()
    return content

setup(
    name="dogma",
    version="0.1.0",
    description="Follow DNA through transcription and translation",
    long_description=read_file("README.rst"),
    long_description_content_type="text/x-rst",
    license="GPL-3",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Natural Language :: English',
        'Operating System :: MacOS',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Education',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    platforms=["linux", "macos"],
    keywords="bioinformatics education transcription translation codon",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'dogma': ['etc/*.yml']},
    zip_safe=False,
    install_requires=[
        'click>8',
        'ruamel.yaml>0.15',
        'coloredlogs',
        'xdg>=5',  # user paths
        'tqdm>=4.21.0',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    python_requires='>=3.10',
    include_package_data=True,
    entry_points='''
        [console_scripts]
        dogma=dogma.cli:main
    ''',
)
