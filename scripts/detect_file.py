import asyncio
import os
import sys

# Add project root to path so we can import voxguard
sys.path.append(os.getcwd())

from voxguard.projection import project_result
from voxguard.services import ClassifierClient, EncodingError, read_audio_file
from voxguard.sessions import DetectionPhase, DetectionSession


async def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/detect_file.py path/to/audio.mp3")
        return

    file_path = sys.argv[1]
    print(f"Reading {file_path}...")
    try:
        blob = await read_audio_file(file_path)
    except EncodingError as e:
        print(f"Could not read audio: {e}")
        return

    client = ClassifierClient()
    session = DetectionSession(client)
    try:
        session.select_file(blob)
        print(f"Analyzing {blob.size} bytes ({blob.mime_type})...")
        await session.analyze()
    finally:
        await client.aclose()

    state = session.state
    if state.phase is not DetectionPhase.RESULT:
        print(f"\nAnalysis failed: {state.error}")
        return

    result = state.result
    view = project_result(result)
    print("\n--- Verdict ---")
    print(f"{view.verdict_label} ({view.percent_one_decimal} confidence)")
    print(f"Language: {result.language.label}")
    print(f"Explanation: {result.explanation}")
    print("\n--- Transcript ---")
    print(result.transcription)
    print("------------------")

if __name__ == "__main__":
    asyncio.run(main())
