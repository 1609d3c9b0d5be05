import pygame


def overlaps(a, b):
    """Strict AABB overlap on logical float geometry."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def lands_on(body, prev_bottom, platform):
    """True if body's bottom crossed platform's top this frame from above."""
    bottom = body.y + body.height
    return (
        body.x < platform.x + platform.width
        and body.x + body.width > platform.x
        and prev_bottom <= platform.y < bottom
    )


def center(entity):
    return entity.x + entity.width / 2, entity.y + entity.height / 2


def to_rect(entity, camera_y=0):
    # Screen-space rect for drawing only; collisions never go through pygame.Rect
    return pygame.Rect(
        int(entity.x), int(entity.y - camera_y), int(entity.width), int(entity.height)
    )
