"""
This script demonstrates the usage of the media_reply library.

It initializes the Google GenAI provider, sends a message made of text and local
attachments through the pipeline, and prints the final reply.

Usage:
    python main.py "What is in this picture?" --image photo.jpg --audio note.mp3
"""

import argparse
import asyncio
import logging
from dotenv import load_dotenv
load_dotenv()
from media_reply import GoogleGenAIProvider, IncomingMessage, ResponseStatus

parser = argparse.ArgumentParser(description="Reply to a multimedia message with Gemini.")
parser.add_argument("texts", nargs="*", help="Text messages sent by the user.")
parser.add_argument("--image", dest="images", action="append", default=[])
parser.add_argument("--audio", dest="audios", action="append", default=[])
parser.add_argument("--video", dest="videos", action="append", default=[])
parser.add_argument("--sticker", dest="stickers", action="append", default=[])
parser.add_argument("--document", dest="documents", action="append", default=[])
parser.add_argument("--context", dest="context_prompt", default="", help="Previous conversation.")
parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
args = parser.parse_args()

logging.basicConfig(level=logging.INFO)

# Initialize the provider (ensure GOOGLE_API_KEY is set in .env)
provider = GoogleGenAIProvider(timeout=args.timeout)

message = IncomingMessage(
    texts=args.texts,
    images=args.images,
    audios=args.audios,
    videos=args.videos,
    stickers=args.stickers,
    documents=args.documents,
    context_prompt=args.context_prompt
)
print(message)

result = asyncio.run(provider.process_message(message))
if result.status == ResponseStatus.SUCCESS:
    print(result.response)
else:
    print(f"{result.message}: {result.error}")
