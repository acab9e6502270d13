"""Configuration loading, colour parsing and colour themes."""