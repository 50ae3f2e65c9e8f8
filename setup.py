from setuptools import setup, find_packages

setup(
    name="skillswap-exchange",
    version="0.1",
    python_requires=">=3.11",
    packages=find_packages(exclude=["tests", "tests.*", "alembic", "alembic.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        # passlib 1.7.4 breaks on bcrypt>=4.1
        "bcrypt==4.0.1",
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "alembic"
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
