from setuptools import setup

setup(
    name='binstr',
    version='0.1.0',
    url='',
    license='AGPL-3.0-only',

    description='Convert between bytes and strings of binary digits',
    long_description='',

    packages=['binstr'],

    python_requires='>=3.10',

    extras_require={
        'dev': [
            'mypy>=0.991',
            'flake8>=5.0.4',
            'pytest>=7.2.0'
        ]
    },

    entry_points={
        'console_scripts': [
            'binstr = binstr.__main__:main'
        ]
    }
)
