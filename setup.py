from setuptools import setup

def readme():
    with open('README.md') as f:
        return f.read()

setup(
    name='fourplay',
    version='0.1.0',
    keywords='connect four game cli negamax',
    description='Play Connect Four on the command line against a depth-limited negamax engine.',
    long_description=readme(),
    long_description_content_type='text/markdown',
    classifiers=[
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3.9',
    'Topic :: Games/Entertainment :: Puzzle Games',
    ],
    license='MIT',
    packages=[
        'fourplay'
    ],
    python_requires='>=3.9',
    install_requires=[
        'codetiming',
    ],
    extras_require={
        'test': ['pytest'],
    },
    scripts=['bin/fourplay'],
    include_package_data=True,
    zip_safe=False)
