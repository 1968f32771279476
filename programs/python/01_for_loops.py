# For Loops - Complexity: 1/6
# Tests counting, reverse, indexed, nested, unbounded and multi-counter loops

import time

SEPARATOR = "\n--- Next Example ---\n"

# Basic counting loop
for i in range(1, 6):
    print(f"Count: {i}")

print(SEPARATOR)

# Reverse counting loop
for i in range(5, 0, -1):
    print(f"Reverse count: {i}")

print(SEPARATOR)

# Indexed iteration over a list
numbers = [2, 4, 6, 8, 10]
for index, value in enumerate(numbers):
    print(f"Element at index {index}: {value}")

print(SEPARATOR)

# Nested loops: triangle pattern
rows = 5
for i in range(1, rows + 1):
    for j in range(1, i + 1):
        print("* ", end="")
    print()

print(SEPARATOR)

# Unbounded loop that stops after 300ms
start_time = time.monotonic()
count = 0
while True:
    count += 1
    if (time.monotonic() - start_time) * 1000 >= 300:
        print(f"Count reached: {count}")
        break

print(SEPARATOR)

# Two counters moving in opposite directions
for i, j in zip(range(1, 6), range(10, 0, -1)):
    print(f"i = {i}, j = {j}")
