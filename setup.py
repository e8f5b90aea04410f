from setuptools import setup, find_packages


setup(
    name='quatrot',
    version='1.0.0',
    description='Quaternion rotations: axis-angle, vector alignment, rotation matrices, and slerp',
    packages=find_packages(include=['quatrot', 'quatrot.*']),
    python_requires='>=3.11',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
