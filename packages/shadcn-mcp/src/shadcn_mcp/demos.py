"""Usage demos for components.

Curated demos exist for the most common components; any other component
gets a synthesized single-element demo.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ComponentDemo:
    name: str
    description: str
    code: str
    imports: tuple[str, ...] = field(default_factory=tuple)
    preview: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "code": self.code,
            "imports": list(self.imports),
        }


def _ui(module: str, *names: str) -> str:
    return f'import {{ {", ".join(names)} }} from "@/components/ui/{module}"'


_BUTTON = _ui("button", "Button")
_INPUT = _ui("input", "Input")
_LABEL = _ui("label", "Label")

_DEMOS: dict[str, tuple[ComponentDemo, ...]] = {
    "button": (
        ComponentDemo(
            name="Basic Button",
            description="A simple button with different variants",
            imports=(_BUTTON,),
            code="""<div className="flex gap-4">
  <Button>Default</Button>
  <Button variant="secondary">Secondary</Button>
  <Button variant="destructive">Destructive</Button>
  <Button variant="outline">Outline</Button>
  <Button variant="ghost">Ghost</Button>
  <Button variant="link">Link</Button>
</div>""",
        ),
        ComponentDemo(
            name="Button with Icon",
            description="Button with an icon from lucide-react",
            imports=(_BUTTON, 'import { Mail } from "lucide-react"'),
            code="""<Button>
  <Mail className="mr-2 h-4 w-4" /> Login with Email
</Button>""",
        ),
        ComponentDemo(
            name="Loading Button",
            description="Button with loading state",
            imports=(_BUTTON, 'import { Loader2 } from "lucide-react"'),
            code="""<Button disabled>
  <Loader2 className="mr-2 h-4 w-4 animate-spin" />
  Please wait
</Button>""",
        ),
    ),
    "card": (
        ComponentDemo(
            name="Basic Card",
            description="A simple card with header, content, and footer",
            imports=(
                _ui("card", "Card", "CardContent", "CardDescription", "CardFooter", "CardHeader", "CardTitle"),
                _BUTTON,
            ),
            code="""<Card className="w-[350px]">
  <CardHeader>
    <CardTitle>Create project</CardTitle>
    <CardDescription>Deploy your new project in one-click.</CardDescription>
  </CardHeader>
  <CardContent>
    <p>Add your project details here.</p>
  </CardContent>
  <CardFooter className="flex justify-between">
    <Button variant="outline">Cancel</Button>
    <Button>Deploy</Button>
  </CardFooter>
</Card>""",
        ),
        ComponentDemo(
            name="Card with Form",
            description="Card containing a form",
            imports=(
                _ui("card", "Card", "CardContent", "CardDescription", "CardHeader", "CardTitle"),
                _INPUT,
                _LABEL,
                _BUTTON,
            ),
            code="""<Card className="w-[350px]">
  <CardHeader>
    <CardTitle>Account</CardTitle>
    <CardDescription>
      Make changes to your account here. Click save when you're done.
    </CardDescription>
  </CardHeader>
  <CardContent className="space-y-2">
    <div className="space-y-1">
      <Label htmlFor="name">Name</Label>
      <Input id="name" defaultValue="Pedro Duarte" />
    </div>
    <div className="space-y-1">
      <Label htmlFor="username">Username</Label>
      <Input id="username" defaultValue="@peduarte" />
    </div>
  </CardContent>
  <CardFooter>
    <Button>Save changes</Button>
  </CardFooter>
</Card>""",
        ),
    ),
    "input": (
        ComponentDemo(
            name="Basic Input",
            description="Different input types",
            imports=(_INPUT, _LABEL),
            code="""<div className="grid w-full max-w-sm items-center gap-1.5">
  <Label htmlFor="email">Email</Label>
  <Input type="email" id="email" placeholder="Email" />
</div>""",
        ),
        ComponentDemo(
            name="Input with Button",
            description="Input field with an action button",
            imports=(_INPUT, _BUTTON),
            code="""<div className="flex w-full max-w-sm items-center space-x-2">
  <Input type="email" placeholder="Email" />
  <Button type="submit">Subscribe</Button>
</div>""",
        ),
        ComponentDemo(
            name="Disabled Input",
            description="Disabled input field",
            imports=(_INPUT,),
            code='<Input disabled type="email" placeholder="Email" />',
        ),
    ),
    "dialog": (
        ComponentDemo(
            name="Basic Dialog",
            description="A modal dialog with trigger button",
            imports=(
                _ui("dialog", "Dialog", "DialogContent", "DialogDescription", "DialogHeader", "DialogTitle", "DialogTrigger"),
                _BUTTON,
            ),
            code="""<Dialog>
  <DialogTrigger asChild>
    <Button variant="outline">Edit Profile</Button>
  </DialogTrigger>
  <DialogContent className="sm:max-w-[425px]">
    <DialogHeader>
      <DialogTitle>Edit profile</DialogTitle>
      <DialogDescription>
        Make changes to your profile here. Click save when you're done.
      </DialogDescription>
    </DialogHeader>
    <div className="grid gap-4 py-4">
      <p>Profile form fields go here</p>
    </div>
  </DialogContent>
</Dialog>""",
        ),
    ),
    "select": (
        ComponentDemo(
            name="Basic Select",
            description="A dropdown select component",
            imports=(_ui("select", "Select", "SelectContent", "SelectItem", "SelectTrigger", "SelectValue"),),
            code="""<Select>
  <SelectTrigger className="w-[180px]">
    <SelectValue placeholder="Select a fruit" />
  </SelectTrigger>
  <SelectContent>
    <SelectItem value="apple">Apple</SelectItem>
    <SelectItem value="banana">Banana</SelectItem>
    <SelectItem value="blueberry">Blueberry</SelectItem>
    <SelectItem value="grapes">Grapes</SelectItem>
    <SelectItem value="pineapple">Pineapple</SelectItem>
  </SelectContent>
</Select>""",
        ),
    ),
    "form": (
        ComponentDemo(
            name="Login Form",
            description="Form with validation using react-hook-form and zod",
            imports=(
                'import { zodResolver } from "@hookform/resolvers/zod"',
                'import { useForm } from "react-hook-form"',
                'import * as z from "zod"',
                _BUTTON,
                _ui("form", "Form", "FormControl", "FormDescription", "FormField", "FormItem", "FormLabel", "FormMessage"),
                _INPUT,
            ),
            code="""const formSchema = z.object({
  username: z.string().min(2, {
    message: "Username must be at least 2 characters.",
  }),
})

export function ProfileForm() {
  const form = useForm<z.infer<typeof formSchema>>({
    resolver: zodResolver(formSchema),
    defaultValues: {
      username: "",
    },
  })

  function onSubmit(values: z.infer<typeof formSchema>) {
    console.log(values)
  }

  return (
    <Form {...form}>
      <form onSubmit={form.handleSubmit(onSubmit)} className="space-y-8">
        <FormField
          control={form.control}
          name="username"
          render={({ field }) => (
            <FormItem>
              <FormLabel>Username</FormLabel>
              <FormControl>
                <Input placeholder="shadcn" {...field} />
              </FormControl>
              <FormDescription>
                This is your public display name.
              </FormDescription>
              <FormMessage />
            </FormItem>
          )}
        />
        <Button type="submit">Submit</Button>
      </form>
    </Form>
  )
}""",
        ),
    ),
    "toast": (
        ComponentDemo(
            name="Toast Notification",
            description="Show toast notifications",
            imports=(_BUTTON, _ui("use-toast", "useToast")),
            code="""export function ToastDemo() {
  const { toast } = useToast()

  return (
    <Button
      variant="outline"
      onClick={() => {
        toast({
          title: "Scheduled: Catch up",
          description: "Friday, February 10, 2023 at 5:57 PM",
        })
      }}
    >
      Show Toast
    </Button>
  )
}""",
        ),
    ),
    "table": (
        ComponentDemo(
            name="Basic Table",
            description="A simple data table",
            imports=(_ui("table", "Table", "TableBody", "TableCaption", "TableCell", "TableHead", "TableHeader", "TableRow"),),
            code="""<Table>
  <TableCaption>A list of your recent invoices.</TableCaption>
  <TableHeader>
    <TableRow>
      <TableHead className="w-[100px]">Invoice</TableHead>
      <TableHead>Status</TableHead>
      <TableHead>Method</TableHead>
      <TableHead className="text-right">Amount</TableHead>
    </TableRow>
  </TableHeader>
  <TableBody>
    <TableRow>
      <TableCell className="font-medium">INV001</TableCell>
      <TableCell>Paid</TableCell>
      <TableCell>Credit Card</TableCell>
      <TableCell className="text-right">$250.00</TableCell>
    </TableRow>
    <TableRow>
      <TableCell className="font-medium">INV002</TableCell>
      <TableCell>Pending</TableCell>
      <TableCell>PayPal</TableCell>
      <TableCell className="text-right">$150.00</TableCell>
    </TableRow>
    <TableRow>
      <TableCell className="font-medium">INV003</TableCell>
      <TableCell>Unpaid</TableCell>
      <TableCell>Bank Transfer</TableCell>
      <TableCell className="text-right">$350.00</TableCell>
    </TableRow>
  </TableBody>
</Table>""",
        ),
    ),
    "tabs": (
        ComponentDemo(
            name="Basic Tabs",
            description="Tab navigation component",
            imports=(
                _ui("tabs", "Tabs", "TabsContent", "TabsList", "TabsTrigger"),
                _ui("card", "Card", "CardContent", "CardDescription", "CardHeader", "CardTitle"),
            ),
            code="""<Tabs defaultValue="account" className="w-[400px]">
  <TabsList className="grid w-full grid-cols-2">
    <TabsTrigger value="account">Account</TabsTrigger>
    <TabsTrigger value="password">Password</TabsTrigger>
  </TabsList>
  <TabsContent value="account">
    <Card>
      <CardHeader>
        <CardTitle>Account</CardTitle>
        <CardDescription>
          Make changes to your account here. Click save when you're done.
        </CardDescription>
      </CardHeader>
      <CardContent>
        <p>Account settings form goes here</p>
      </CardContent>
    </Card>
  </TabsContent>
  <TabsContent value="password">
    <Card>
      <CardHeader>
        <CardTitle>Password</CardTitle>
        <CardDescription>
          Change your password here. After saving, you'll be logged out.
        </CardDescription>
      </CardHeader>
      <CardContent>
        <p>Password change form goes here</p>
      </CardContent>
    </Card>
  </TabsContent>
</Tabs>""",
        ),
    ),
}


def _title(component: str) -> str:
    return component[:1].upper() + component[1:]


def default_demo(component: str) -> ComponentDemo:
    title = _title(component)
    return ComponentDemo(
        name=f"Basic {title}",
        description=f"Basic usage of the {component} component",
        imports=(f'import {{ {title} }} from "@/components/ui/{component}"',),
        code=f"<{title}>\n  {title} content\n</{title}>",
    )


def demos_for(component: str) -> list[ComponentDemo]:
    """All demos for a component, falling back to a synthesized one."""
    demos = _DEMOS.get(component)
    if not demos:
        return [default_demo(component)]
    return list(demos)


def get_demo(component: str, index: int = 0) -> ComponentDemo:
    """Return the demo at ``index``; out-of-range indexes select the first."""
    demos = demos_for(component)
    if index < 0 or index >= len(demos):
        index = 0
    return demos[index]


def format_demo_code(demo: ComponentDemo) -> str:
    """Render a demo as a self-contained React component."""
    imports = "\n".join(demo.imports)
    body = "\n".join("    " + line for line in demo.code.split("\n")).strip()
    func_name = re.sub(r"\s+", "", demo.name) + "Demo"
    return (
        f"{imports}\n\n"
        f"export function {func_name}() {{\n"
        f"  {demo.preview}\n"
        f"  \n"
        f"  return (\n"
        f"    {body}\n"
        f"  )\n"
        f"}}"
    )
