import matplotlib.pyplot as plt
import matplotlib.patches as patches
import matplotlib.widgets as widgets
import requests

# CONFIGURATION
SERVER_URL = "http://localhost:5000"
TIMEOUT    = 5

# Direction angle → arrow drawing params (adx, ady) from the cell centre
FACE_ARROW = {0: (0, 0.3), 90: (0.3, 0), 180: (0, -0.3), 270: (-0.3, 0)}


class TabletopDashboard:
    """
    Live view of the tabletop. Commands are sent to the server, which owns
    the robot; the board is redrawn from whatever position it returns.
    """

    # =========================================================================
    # INIT
    # =========================================================================

    def __init__(self, server_url: str = SERVER_URL, show: bool = True):
        self.server_url = server_url.rstrip("/")
        self.position   = {"placed": False}
        self.size_x     = 5
        self.size_y     = 5
        self.history    = []           # Recent command lines, newest last

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(7, 8))
        plt.subplots_adjust(bottom=0.25)

        # --- Row 1: Command entry ---
        self.txt_command = widgets.TextBox(plt.axes([0.15, 0.14, 0.55, 0.05]), 'Command ')
        self.txt_command.on_submit(self.submit_line)

        self.btn_reset = widgets.Button(plt.axes([0.74, 0.14, 0.16, 0.05]), 'Reset', color='salmon')
        self.btn_reset.on_clicked(self.reset)

        # --- Row 2: Quick commands ---
        self.buttons = []
        for i, cmd in enumerate(["MOVE", "LEFT", "RIGHT", "REPORT"]):
            btn = widgets.Button(plt.axes([0.05 + i * 0.22, 0.07, 0.2, 0.05]), cmd, color='lightblue')
            btn.on_clicked(lambda event, c=cmd: self.send(c))
            self.buttons.append(btn)

        self.ax_status = plt.axes([0.05, 0.0, 0.9, 0.05])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=9, color='gray'
        )

        self.refresh()
        if show:
            plt.show()

    # =========================================================================
    # SERVER CALLS
    # =========================================================================

    def _post(self, path, payload=None):
        res = requests.post(f"{self.server_url}{path}", json=payload, timeout=TIMEOUT)
        res.raise_for_status()
        return res.json()

    def refresh(self, event=None):
        try:
            res = requests.get(f"{self.server_url}/status", timeout=TIMEOUT)
            res.raise_for_status()
            bounds = res.json()["board"]
            self.size_x = bounds["max_x"] + 1
            self.size_y = bounds["max_y"] + 1
            self.position = requests.get(f"{self.server_url}/position", timeout=TIMEOUT).json()
            self._set_status("Connected, type PLACE X,Y,F to start", "gray")
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
        self.redraw()

    def send(self, line):
        try:
            data = self._post("/command", {"line": line})
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
            return

        self.position = data["position"]
        self.history = (self.history + [line])[-5:]
        if data["report"]:
            self._set_status(data["report"], "blue")
        elif data["command"] is None:
            self._set_status(f"Not a command: '{line}'", "orange")
        elif not data["applied"]:
            self._set_status(f"{data['command']} ignored", "orange")
        else:
            self._set_status(f"{data['command']} ok", "green")
        self.redraw()

    def submit_line(self, text):
        if not text.strip():
            return
        self.send(text)
        self.txt_command.set_val("")

    def reset(self, event):
        try:
            self.position = self._post("/reset")
            self.history = []
            self._set_status("Robot removed from the table", "gray")
        except requests.RequestException as e:
            self._set_status(f"Connection failed: {e}", "red")
        self.redraw()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def _set_status(self, message, color):
        self.status_text.set_text(f"Status: {message}")
        self.status_text.set_color(color)

    def redraw(self):
        self.ax.clear()
        self.ax.set_xlim(0, self.size_x)
        self.ax.set_ylim(0, self.size_y)
        self.ax.set_xticks(range(self.size_x + 1))
        self.ax.set_yticks(range(self.size_y + 1))
        self.ax.grid(True, color='lightgray')
        self.ax.set_aspect('equal')

        if self.position.get("placed"):
            x, y, d = self.position["x"], self.position["y"], self.position["d"]
            self.ax.add_patch(patches.Rectangle((x, y), 1, 1, color='lightgreen', alpha=0.6))
            adx, ady = FACE_ARROW[d]
            self.ax.arrow(x + 0.5, y + 0.5, adx, ady, head_width=0.15, color='black')
            title = f"({x}, {y}) facing {self.position['facing']}"
        else:
            title = "Robot not placed"

        if self.history:
            title += "\n" + " · ".join(self.history)
        self.ax.set_title(title, fontsize=10)
        self.fig.canvas.draw_idle()


if __name__ == "__main__":
    TabletopDashboard()
