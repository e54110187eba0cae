#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt']
bench_requires = ['tabulate']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='kvtransduce',
    version='0.1.0',
    packages=['kvtransduce'],
    install_requires = requires,
    extras_require = {'bench': bench_requires, 'test': test_requires},
    entry_points = {
      'console_scripts': [
        'kvbench = kvtransduce.bench:main',
        ],
    },
    license='MIT',
    description='single pass map/filter/fold transducers over keyed collections.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
