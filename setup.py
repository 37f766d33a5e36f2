from setuptools import setup, find_packages

setup(
    name="BNB_KP",
    version="0.1.0",
    packages=find_packages(exclude=["test", "test.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "seaborn",
        "tqdm",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'bnbkp-solve = Scripts.solve:main',
            'bnbkp-generate = Scripts.generate_data:main',
            'bnbkp-evaluate = Scripts.evaluate_solvers:main',
        ],
    }
)
