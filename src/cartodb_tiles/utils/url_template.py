def build_template(username: str, hostname: str, layergroup_id: str, scale: int = 1) -> str:
    """Tile URL template for an instantiated layer group"""
    scale_modifier = f"@{scale}x" if scale > 1 else ""
    return (f"https://{username}.{hostname}/api/v1/map/{layergroup_id}"
            f"/{{z}}/{{x}}/{{y}}{scale_modifier}.png")
