from setuptools import setup


setup(name='symtab',
      version='1.0',
      description='Ordered symbol tables backed by a left-leaning red-black tree',
      packages=['symtab'],
      python_requires='>=3.6',
      entry_points={
          'console_scripts': ['symtab-freq=symtab.__main__:main'],
      },
      test_suite='tests',
)
