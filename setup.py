#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'delnone', 'tqdm']
test_requires = ['pytest', 'tabulate']

setup(
    name='foldxf',
    version='0.1.0',
    packages=['foldxf'],
    install_requires = requires,
    extras_require = {
      'test': test_requires,
    },
    license='MIT',
    description='transducers: composable reducing function transformations, independent of source and sink.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
