from setuptools import setup, find_packages

setup(
    name='monotrace',
    version='0.3.0',
    description='Parser of the Mono (Unity engine) exception dumps into structured trees',
    packages=find_packages(include=['monotrace', 'monotrace.*']),
    python_requires='>=3.9',
    install_requires=[
        'click', 'termcolor>=2.1', 'ruamel.yaml', 'tabulate',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points='''
        [console_scripts]
        monotrace=monotrace.cli:launch_cli
    ''',
)
