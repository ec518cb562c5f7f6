from setuptools import setup

setup(
    name='ogmeta',
    version='0.1',
    license='AGPL',
    packages=['ogmeta'],
    python_requires='>=3.7',
    install_requires=[
        'beautifulsoup4',
        'tornado',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'ogmeta = ogmeta.__main__:main',
        ]
    }
)
