from .color_normalizer import ColorInput, normalize_color_input, parse_hex_color, resolve_colors

__all__ = ["ColorInput", "normalize_color_input", "parse_hex_color", "resolve_colors"]
