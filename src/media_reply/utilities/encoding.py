import aiofiles
import os
import base64

async def encode_file_base64(file_path: str | os.PathLike[str]) -> str:
    """
    Read a whole file and encode its contents as base64.

    The read is awaited, so other pending work can run while the file is loaded.

    Args:
        file_path (str | os.PathLike[str]): The path of the file to read.

    Returns:
        str: The base64-encoded contents of the file.

    Raises:
        OSError: If the file is missing, unreadable or the read fails.
    """
    async with aiofiles.open(file_path, "rb") as file:
        data = await file.read()
    return base64.b64encode(data).decode("utf-8")
