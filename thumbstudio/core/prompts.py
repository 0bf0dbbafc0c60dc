analysis_template = (
    "Analyze YouTube IDs: {video_ids}. "
    "Provide catchy titles, social desc, and SEO tags."
)

transcription_prompt = "Transcribe this audio accurately."
