"""Bird versus world hit tests.

The bird is treated as its bounding square rather than a true circle, which
is slightly harsher on the corners of a pipe but matches what players see.
"""


def hits_bounds(bird, screen_height, floor_height):
    if bird.bottom > screen_height - floor_height:
        return True
    return bird.top < 0


def hits_obstacle(bird, obstacle):
    if bird.right > obstacle.x and bird.left < obstacle.right:
        return bird.top < obstacle.gap_top or bird.bottom > obstacle.gap_bottom
    return False


def check_collision(bird, obstacles, screen_height, floor_height):
    if hits_bounds(bird, screen_height, floor_height):
        return True
    return any(hits_obstacle(bird, o) for o in obstacles)
