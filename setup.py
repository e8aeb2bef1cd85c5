from setuptools import setup, find_packages

setup(
    name="lazy_clients",
    version="1.0.0",
    description="Lazily constructed, cached clients for Clerk, Supabase and SQLAlchemy",
    long_description="See DESIGN.md for the design notes.",
    long_description_content_type="text/markdown",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["lazy_clients", "lazy_clients.*"]),
    python_requires=">=3.9",
    install_requires=[
        "clerk-backend-api>=1.0.0",
        "supabase>=2.0.0",
        "SQLAlchemy>=2.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "client-status=lazy_clients.status:main",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
