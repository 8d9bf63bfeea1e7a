"""
Main entry point for the fractal garden.

Grows a recursive Y-shaped tree breadth-first, one branch per tick, and
writes the result in the requested form.

Configuration is loaded from config/garden.json.

Modes:
    gif     - Render the growth animation with Cairo (default)
    png     - Render the final tree with Cairo
    plot    - Plot the final tree with matplotlib
    preview - Show the growth live in a matplotlib window
    export  - Export the drawn segments as JSON
    window  - Open the interactive tkinter garden
"""

import argparse

from config import load_config, GardenRenderConfig
from garden import grow_segments, visualize_garden, animate_growth
from rendering import GardenRenderer, export_garden_data


def main():
    parser = argparse.ArgumentParser(description="Grow a fractal tree.")
    parser.add_argument(
        '--mode',
        type=str,
        choices=['gif', 'png', 'plot', 'preview', 'export', 'window'],
        default='gif',
        help='Output mode (default: gif)'
    )
    parser.add_argument('--config', type=str, default='config/garden.json',
                        help='Path to the garden config JSON')
    args = parser.parse_args()

    config = load_config(args.config)

    print(f"Growing garden: trunk {config.trunk_height}px, "
          f"ratio {config.branch_ratio}, angle {config.branch_angle} deg")
    print(f"  Canvas: {config.width}x{config.height}")
    print(f"Mode: {args.mode}")
    print()

    if args.mode == 'window':
        import tkinter as tk
        from tools.garden_app import GardenApp

        root = tk.Tk()
        root.resizable(False, False)
        GardenApp(root, defaults=config)
        root.mainloop()
        return

    if args.mode == 'preview':
        animate_growth(config)
        return

    config.create_output_dirs()

    if args.mode in ('gif', 'png'):
        renderer = GardenRenderer(GardenRenderConfig())
        if args.mode == 'gif':
            renderer.render_animation(config, str(config.animation_path))
        else:
            renderer.save_frame(config, str(config.frame_path))
            print(f"Saved final frame to {config.frame_path}")
        return

    surface = grow_segments(config)
    print(f"Drew {len(surface.segments)} segments")

    if args.mode == 'plot':
        visualize_garden(surface.segments, config.width, config.height,
                         save_path=str(config.plot_path))
    elif args.mode == 'export':
        export_garden_data(surface, str(config.render_data_path))
        print(f"Exported render data to: {config.render_data_path}")


if __name__ == '__main__':
    main()
