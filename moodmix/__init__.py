"""MoodMix: journal entries scored into mood playlists and gradients."""
