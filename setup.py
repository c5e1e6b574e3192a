from setuptools import setup, find_packages

with open('README.md', 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='camera-models',
    version='0.1.0',
    author='SperidLabs',
    author_email='contact@speridlabs.com',
    description='Camera model registry and parameter validation for COLMAP-style reconstructions',
    long_description=long_description,
    long_description_content_type='text/markdown',
    url='https://github.com/speridlabs/camera-models',
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.7',
    install_requires=[
        'numpy>=1.20.0',  # numpy.typing
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
        ]
    },
)
