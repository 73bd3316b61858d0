"""
Load environment variables from a .env file in the working directory.
"""
from pathlib import Path
from typing import Union

from dotenv import load_dotenv


def load_env(env_file: Union[str, Path] = ".env") -> bool:
    """
    Load key=value pairs from ``env_file`` into os.environ.

    Values in the file override variables already set. A missing file is
    not an error.

    Returns:
        True if at least one variable was set from the file.
    """
    env_path = Path(env_file)
    if not env_path.is_file():
        return False
    return load_dotenv(dotenv_path=env_path, override=True)
