# -*- coding: utf-8 -*-
import os
from setuptools import setup, find_packages

README = open(os.path.join(os.path.dirname(__file__), 'README.rst')).read()

# allow setup.py to be run from any path
os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

setup(
    name="django-user-token",
    version="0.1",
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'Django>=3.2',
        'psycopg2-binary>=2.8',
    ],
    extras_require={
        'test': [
            'pytest>=6.0',
            'pytest-django>=4.0',
        ],
    },
    include_package_data=True,
    description='Django app for storing and bulk-resetting per-user secret tokens.',
    license='MIT',
    long_description=README,
    url='https://github.com/yunojuno/django-user-token',
    author='YunoJuno',
    author_email='code@yunojuno.com',
    maintainer='YunoJuno',
    maintainer_email='code@yunojuno.com',
    classifiers=[
        'Environment :: Web Environment',
        'Framework :: Django',
        'Framework :: Django :: 3.2',
        'Framework :: Django :: 4.2',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
)
