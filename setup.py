from setuptools import setup

# install with: pip install -e .

setup(
    name='wordpuzzle',
    version='0.1.0',
    packages=['wordpuzzle'],
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'solver = wordpuzzle.solverui:cli',
            'interactive = wordpuzzle.interactive:cli',
        ],
    },
)
