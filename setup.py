#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup

setup(
    name='TwisterClone',
    description='MT19937 generation, untempering, state cloning and seed recovery.',
    version='0.1',

    license='MIT',

    author='aldur',
    author_email='adrianodl@hotmail.it',

    packages=['twister'],
    install_requires=[
        'colorama'
    ],
    extras_require={
        'test': ['pytest'],
    },

    scripts=['bin/twister'],

    zip_safe=False,
    include_package_data=True,
)
