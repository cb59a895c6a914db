"""
Setup.py script for jsobjspace
"""
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='jsobjspace',
    version='0.1.0',
    description='A reference object space for the JavaScript object model',
    long_description=long_description,

    license='MIT',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Interpreters',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='javascript interpreter object-model',

    packages=find_packages(include=('jsobjspace', 'jsobjspace.*')),
    python_requires='>=3.6',

    install_requires=['py'],
    extras_require={
        'test': ['pytest'],
    },
)
