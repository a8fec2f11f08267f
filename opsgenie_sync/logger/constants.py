SUCCESS_LEVEL = 25
PRINT_LEVEL = 5
