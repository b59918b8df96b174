from setuptools import find_packages, setup

setup(
    name='snesbridge',
    version='1.0.0',
    description='Async client for the usb2snes websocket protocol',
    author='isantolin',
    author_email='',
    packages=find_packages(include=['snesbridge', 'snesbridge.*']),
    python_requires='>=3.11',
    install_requires=[
        'construct',
        'marshmallow',
        'msgspec',
        'websocket-client',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
