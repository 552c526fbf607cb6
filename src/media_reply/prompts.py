"""Fixed instruction texts sent to the remote model."""

IMAGE_PROMPT = (
    "Examine the image thoroughly. Describe every detail, including all objects, colors, textures, "
    "actions, and backgrounds. Note the position, size, and shape of each element. Capture any text, "
    "lighting, or patterns. Provide a precise, comprehensive description to fully represent the image "
    "without assumptions or interpretations."
)

AUDIO_PROMPT = (
    "Listen to the audio carefully. Transcribe every word exactly as spoken, including tone, pauses, "
    "and any background sounds. Describe the speaker's accent, speed, and emotional tone. Note any "
    "unclear parts and timestamp them. Provide a precise, detailed summary of the content without "
    "adding interpretations."
)

VIDEO_PROMPT = (
    "Watch the video closely. Describe every detail, including all actions, objects, colors, textures, "
    "and backgrounds. Note the sequence, timing, and duration of events. Capture any text, lighting, "
    "camera angles, or sound elements. If evident, identify and describe the emotional or sentimental "
    "tone (e.g., joy, sadness, enthusiasm) based on clear cues like facial expressions, voice tone, or "
    "music, without assumptions. For neutral content, such as stock or demonstration videos, note the "
    "absence of emotional tone. Provide a precise, comprehensive description to fully represent the video."
)

STICKER_PROMPT = (
    "Examine the sticker closely. Identify and describe the specific emotions, feelings, or allusions it "
    "conveys, such as affection, gratitude, joy, or affirmation. Focus solely on the intended emotional "
    "purpose, inferred from clear visual cues like expressions, symbols (e.g., hearts), or actions. Avoid "
    "describing the image's content or making assumptions beyond evident emotional intent. Provide a "
    "precise, concise analysis of the sticker's emotional message."
)

DOCUMENT_PROMPT = (
    "Examine the document meticulously. Extract and list all key factual information, technical "
    "specifications, data points, and specific details with precision. Summarize the content accurately, "
    "focusing solely on objective information. Exclude any interpretation, sentiment analysis, or "
    "assumptions. Ensure the summary is concise, technical, and faithful to the document's content."
)

FINAL_RESPONSE_PREAMBLE = (
    "This is the user's text messages and the provided transcriptions of the audio, video, images, "
    "stickers, or documents in text format. Respond directly and concisely, continuing the conversation "
    "by addressing the user's query or topic based on the transcriptions. Stay relevant, avoid "
    "misinterpretations, and do not add unrelated information."
)

ASSISTANT_SYSTEM_INSTRUCTION = (
    "You are a conversational assistant. Receive the user's messages in text/plain format and any "
    "provided transcriptions or descriptions of audio, video, images, stickers, or documents in text "
    "format. If available, consider the conversation history to maintain context. Understand the context "
    "and intent of the user's messages. Respond concisely and directly, continuing the conversation by "
    "addressing the user's query or topic based on the provided content. Stay relevant, accurate, and "
    "focused on the objective information or emotional intent conveyed in the transcriptions. Avoid "
    "misinterpretations, assumptions, or unrelated information."
)
