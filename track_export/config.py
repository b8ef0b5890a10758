"""Configuration constants for track-export."""

# Folder created next to the project file (or on the desktop) for exports
OUTPUT_SUBFOLDER = "AudioExports"

# Label used when a sanitized name would otherwise be empty
FALLBACK_TRACK_LABEL = "UnnamedTrack"

# Unnamed tracks are exported as Track_<n>
UNNAMED_TRACK_PREFIX = "Track_"

# Replacement for characters that are illegal in file names
FILENAME_PLACEHOLDER = "_"

# pathvalidate platform; "universal" gives the same result on every OS
FILENAME_PLATFORM = "universal"

# Longest file name most file systems accept
MAX_FILENAME_LEN = 255

# A render format counts as audio when its name contains one of these
AUDIO_FORMAT_KEYWORDS = ("wav", "wave", "audio")

# Title shown on every notice
NOTICE_TITLE = "Export Audio Tracks"

FORMAT_PROMPT_TITLE = "Select Audio Renderer"
PROFILE_PROMPT_TITLE = "Select Render Template"

# Local host render catalog.
# format name -> (extension, backend, container)
# backend "soundfile" writes through libsndfile, "ffmpeg" pipes to FFmpeg.
RENDER_FORMATS = {
    "Wave (Microsoft)": (".wav", "soundfile", "WAV"),
    "FLAC Audio": (".flac", "soundfile", "FLAC"),
    "Vorbis Audio (OGG)": (".ogg", "soundfile", "OGG"),
    "MP3 Audio": (".mp3", "ffmpeg", "mp3"),
}

# format name -> [(profile name, codec, quality)]
# codec is a libsndfile subtype or an FFmpeg encoder name.
RENDER_PROFILES = {
    "Wave (Microsoft)": [
        ("16-bit PCM", "PCM_16", None),
        ("24-bit PCM", "PCM_24", None),
        ("32-bit Float", "FLOAT", None),
    ],
    "FLAC Audio": [
        ("16-bit", "PCM_16", None),
        ("24-bit", "PCM_24", None),
    ],
    "Vorbis Audio (OGG)": [
        ("Vorbis", "VORBIS", None),
    ],
    "MP3 Audio": [
        ("320 Kbps", "libmp3lame", "320k"),
        ("192 Kbps", "libmp3lame", "192k"),
    ],
}
