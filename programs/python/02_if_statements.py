# Conditionals - Complexity: 1/6
# Tests if, if-else, elif ladders, nesting, logical operators,
# conditional expressions and match statements

SEPARATOR = "\n--- Next Example ---\n"

# Basic if
number = 10
if number > 0:
    print("Number is positive")

print(SEPARATOR)

# If-else
age = 18
if age >= 18:
    print("You are an adult")
else:
    print("You are a minor")

print(SEPARATOR)

# Elif ladder
score = 75
if score >= 90:
    print("Grade: A")
elif score >= 80:
    print("Grade: B")
elif score >= 70:
    print("Grade: C")
else:
    print("Grade: F")

print(SEPARATOR)

# Nested if
has_license = True
driving_age = 16
if age >= driving_age:
    if has_license:
        print("You can drive")
    else:
        print("You need a license to drive")
else:
    print("You are too young to drive")

print(SEPARATOR)

# Logical operators
is_weekend = True
is_holiday = False
if is_weekend or is_holiday:
    print("No work today!")
else:
    print("It's a working day")

print(SEPARATOR)

# Conditional expression
x = 5
y = 10
maximum = x if x > y else y
print(f"The maximum value is: {maximum}")

print(SEPARATOR)

# Match statement
day_of_week = 3
match day_of_week:
    case 1:
        print("Monday")
    case 2:
        print("Tuesday")
    case 3:
        print("Wednesday")
    case 4:
        print("Thursday")
    case 5:
        print("Friday")
    case _:
        print("Weekend")
