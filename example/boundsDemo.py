import simmath
from simmath import *


# Bounds of a few parts, corners given in any order
parts = [
    Box(0, 0, 0, 1, 1, 1),
    Box(Vector3r(3, 0.5, 2), Vector3r(2, 0, 0)),
    Box(-1, -1, 4, 0.5, 0.5, 5),
]

############################ Union ############################
scene = Box(parts[0])
for part in parts[1:]:
    scene += part

print("Scene bounds:", scene)
print("Size:  ", vectorToString(scene.size()))
print("Center:", vectorToString(scene.center()))


############################ Overlap ############################
for i, a in enumerate(parts):
    for j, b in enumerate(parts[i + 1 :], start=i + 1):
        print(f"parts[{i}] intersects parts[{j}]:", a.intersects(b))


# Shift everything back to the origin
shifted = scene - scene.min
print("Shifted:", shifted)
