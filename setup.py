from setuptools import setup, find_packages


setup(name='vectoral',
      version='1.0.0',
      description='Extended precision numbers, fractions, vectors, and quaternions built on numpy',
      packages=find_packages(include=['vectoral', 'vectoral.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest']})
