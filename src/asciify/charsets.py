# Ordered from densest glyph to sparsest; index 0 is darkest
ASCII_RAMP = "@$#%&MW8BZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,.\"^`' "
