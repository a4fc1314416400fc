# %%
from build123d import Location
from ocp_vscode import show_object, set_defaults, Camera

from build123_dovetail import (
    INCH,
    BoardLayout,
    DisplayMode,
    DovetailJoint,
    JointParameters,
    build_scene,
    derive_dimensions,
    place_pins,
    place_tails,
)

set_defaults(reset_camera=Camera.CENTER)

# %%
# Default joint: 3/4" x 3 1/2" stock, five tails, 8:1 slope, boards side by side
params = JointParameters()
dims = derive_dimensions(params)

print("=== Default joint ===")
print(params)
print(f"Pins:    {dims.pin_width_narrow:.2f} → {dims.pin_width_wide:.2f} mm")
print(f"Tails:   {dims.tail_width_narrow:.2f} → {dims.tail_width_wide:.2f} mm")
print(f"Overlap: {dims.overlap_width:.3f} mm")
print("Tails at", [round(p.offset, 2) for p in place_tails(dims)])
print("Pins at ", [round(p.offset, 2) for p in place_pins(dims)])

scene = build_scene(params)
for board in scene:
    show_object(board.global_shape, name=board.name)

# %%
# Assembled: the tails board stands in the pins board's sockets
assembled = params.replace(board_layout=BoardLayout.ASSEMBLED)
pins, tails = DovetailJoint(assembled).apply()

clash = pins.global_shape & tails.global_shape
print("=== Assembled ===")
print(f"Interference volume: {clash.volume:.6f} mm³ (expected: 0)")

show_object(pins.global_shape, name="pins", options={"alpha": 0.6})
show_object(tails.global_shape, name="tails")

# %%
# Cutters on their own: tail cutters over the pins blank, mirrored pin cutters
# over the tails blank
joint = DovetailJoint(params)
show_object(joint.build_pins_board().blank, name="Pins blank", options={"color": "orange", "alpha": 0.3})
show_object(joint.get_pins_feature(), name="Tail cutters", options={"color": "red"})

offset = Location((params.stock_width + 3 * INCH, 0, 0))
show_object(joint.build_tails_board().blank.moved(offset), name="Tails blank", options={"color": "orange", "alpha": 0.3})
show_object(joint.get_tails_feature().moved(offset), name="Pin cutters", options={"color": "red"})

# %%
# Batch of joint sizes in one session
for i, (teeth, pin) in enumerate([(3, 6.0), (4, 4.0), (7, 2.5)]):
    sized = JointParameters(tooth_count=teeth, narrow_pin_width=pin, display_mode=DisplayMode.PINS)
    board = build_scene(sized).boards[0]
    y = (i + 1) * (sized.stock_length + 2 * INCH)
    show_object(board.global_shape.moved(Location((0, y, 0))), name=f"pins_{teeth}x{pin}")
