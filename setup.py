"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='algebraic-adt',
	version='0.4.0',
	packages=['algebraic', 'algebraic.examples', ],
	license='MIT',
	description='Algebraic data types for Python: tagged families, records, enumerations and singletons, checked at construction time',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
	],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		"test": ["pytest"],
	},
)
