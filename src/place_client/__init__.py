"""Client-side interaction controller for a collaborative pixel canvas."""
