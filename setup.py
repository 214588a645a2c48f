#!/usr/bin/env python

"""The setup script."""

from setuptools import setup, find_packages

with open('README.md', "r") as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', "r") as history_file:
    history = history_file.read()

with open("requirements.txt", "r") as requirements_file:
    requirements = requirements_file.read().splitlines()

test_requirements = ['pytest>=3', ]

setup(
    author="Oded Shimon",
    author_email='audreyr@example.com',
    version='0.1.3',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
    ],
    description="AMQP (RabbitMQ) connection URI parser producing connect options for synchronous and "
                "asynchronous clients",
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="MIT license",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/markdown',
    include_package_data=True,
    keywords='bunny_uri amqp rabbitmq uri',
    name='bunny_uri',
    packages=find_packages(include=['bunny_uri', 'bunny_uri.*']),
    url='https://github.com/odedshimon/bunny-uri',
    zip_safe=False,
)
